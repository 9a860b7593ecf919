# Ошибки, которые возникают при чтении, проверке и записи автоматов.


class AutomatonError(Exception):
    pass


class FormatError(AutomatonError, ValueError):
    """Некорректная таблица автомата. line – номер строки файла (с единицы)."""

    def __init__(self, message, line=None):
        self.line = line
        if line is not None:
            message = f"строка {line}: {message}"
        super().__init__(message)


class InvariantError(AutomatonError):
    pass


class AutomatonIOError(AutomatonError, OSError):
    def __init__(self, message, path):
        self.path = path
        super().__init__(f"{message}: {path}")


class RenderError(AutomatonError):
    pass
