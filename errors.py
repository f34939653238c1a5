class ModuleError(Exception):
    '''
    Base class for every error raised by module operations.
    '''


class IncompatibleModulesError(ModuleError):
    '''
    Raised when two modules have no common ancestor, or when elements of
    different modules are combined.
    '''


class IncompatibleDimensionsError(ModuleError, ValueError):
    '''
    Raised when modules, elements or matrices of different rank or shape
    are combined.
    '''


class CoercionError(ModuleError, ValueError):
    '''
    Raised when a value cannot be represented in the requested ring or
    module.
    '''


class DivisionError(ArithmeticError):
    '''
    Raised on an inexact division or on inverting a non-unit.
    '''
