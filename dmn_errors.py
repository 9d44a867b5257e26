class DmnError(Exception):
    pass


class DecodeError(DmnError):
    def __init__(self, source, reason):
        self.source = source
        self.reason = reason

    def __str__(self):
        return f"Could not decode {self.source}: {self.reason}"


class NetworkError(DmnError):
    def __init__(self, url, cause):
        self.url = url
        self.cause = cause

    def __str__(self):
        return f"Request to {self.url} failed: {self.cause}"


class FileError(DmnError):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause

    def __str__(self):
        return f"Could not open {self.path}: {self.cause}"


class InvalidDecisionTable(DmnError):
    def __init__(self, table_id, message):
        self.table_id = table_id
        self.message = message

    def __str__(self):
        return f"Decision table {self.table_id}: {self.message}"
