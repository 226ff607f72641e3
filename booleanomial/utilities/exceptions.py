class BooleanomialException(Exception):
    pass

class InvalidTermCountException(BooleanomialException, ValueError):
    pass

class OutOfRangeException(BooleanomialException, IndexError):
    pass

class DimensionMismatchException(BooleanomialException, ValueError):
    pass
