import numpy.random


def pytest_runtest_setup(item):
    """ Hook function which is called before every test """

    # Fix the seed so the randomly drawn sets are the same on every run
    numpy.random.seed(21)
