""" Helpers shared by the language front-ends """
