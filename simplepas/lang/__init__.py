""" Language front-ends """
