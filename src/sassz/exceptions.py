class SasszError(Exception):
    exit_code = 1


class UsageError(SasszError):
    pass


class ConfigurationError(SasszError):
    pass


class InputError(SasszError):
    exit_code = 2


class InputReadError(InputError):
    pass


class InputMemoryError(InputError):
    pass


class DependencyFileError(SasszError):
    pass
