import sys
import unittest
import os


path_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..')
sys.path.insert(0, path_dir)

loader = unittest.TestLoader()
suite = unittest.TestSuite()

test_dir = os.path.dirname(os.path.abspath(__file__))
for test in loader.discover(test_dir):
    suite.addTest(test)

result = unittest.TextTestRunner().run(suite)
sys.exit(0 if result.wasSuccessful() else 1)
