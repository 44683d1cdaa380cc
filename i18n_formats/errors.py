class I18nError(Exception):
    """Base class for every conversion failure"""


class NoInputFiles(I18nError):
    def __init__(self, directory):
        self.directory = directory
        super().__init__(f"no .properties files found in the input directory {directory}")


class MalformedFilename(I18nError):
    def __init__(self, path, parts: int):
        self.path = path
        self.parts = parts
        super().__init__(
            f"expected 3 parts from split with \"_\" in the file name: {path}, found {parts}"
        )


class MalformedRecord(I18nError):
    def __init__(self, path, line_number: int, parts: int):
        self.path = path
        self.line_number = line_number
        self.parts = parts
        super().__init__(f"{path}: expected 2 parts found {parts} on line {line_number}")


class MalformedTable(I18nError):
    pass


class MissingTranslation(MalformedTable):
    def __init__(self, key: str, language: str):
        self.key = key
        self.language = language
        super().__init__(f"no {language} translation for key {key}")


class UndecodableFile(I18nError):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: not valid UTF-8 text ({reason})")
