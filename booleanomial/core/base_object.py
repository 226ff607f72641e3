class BaseObject(object):
    """
    Shared base for library objects. Subclasses list the attributes shown by `repr` in `__reprdir__`.
    """

    def __reprdir__(self):
        return list(self.__dict__)


    def __repr__(self):
        fields = ', '.join(f'{attr}={getattr(self, attr)!r}' for attr in self.__reprdir__())
        return f'<{self.__class__.__name__}: {fields}>'


    def __str__(self):
        return self.__repr__()
