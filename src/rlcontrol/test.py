import unittest

from .helpers.test import *
from .approximation.test import *
from .policy.test import *
from .algorithm.test import *



if __name__ == '__main__':
    unittest.main(verbosity=0)
