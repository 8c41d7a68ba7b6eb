from ...interpreter.values import Value


class SymbolTableEntry:
    """ The storage cell backing the value of one identifier """

    def __init__(self, name: str):
        self.name = name
        self.value = None

    @property
    def is_assigned(self):
        return self.value is not None

    def __repr__(self):
        return "SymbolTableEntry({}, {!r})".format(self.name, self.value)


class SymbolTable:
    """ A flat table with all symbols of a program.

    Names are compared case-insensitively, there is a single entry per
    name for the lifetime of the table. """

    # Predefined pascal constants:
    predefined = {
        "true": Value.boolean(True),
        "false": Value.boolean(False),
    }

    def __init__(self):
        self.entries = {}
        for name, value in self.predefined.items():
            self.enter(name).value = value

    @staticmethod
    def canonical(name: str):
        return name.lower()

    def __iter__(self):
        # Iterate in a deterministic manner:
        return iter(sorted(self.entries.values(), key=lambda e: e.name))

    def __len__(self):
        return len(self.entries)

    def __contains__(self, name):
        return self.canonical(name) in self.entries

    def __getitem__(self, name):
        return self.entries[self.canonical(name)]

    def enter(self, name: str) -> SymbolTableEntry:
        """ Create a fresh entry for name, replacing an existing one """
        assert isinstance(name, str)
        entry = SymbolTableEntry(self.canonical(name))
        self.entries[entry.name] = entry
        return entry

    def lookup(self, name: str):
        """ Get the entry for name, or None when not present """
        return self.entries.get(self.canonical(name))

    def __repr__(self):
        return "SymbolTable with {} symbols".format(len(self.entries))
