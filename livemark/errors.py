class LivemarkError(Exception):
    pass


class DropRejected(LivemarkError):
    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class FileAccessError(LivemarkError):
    def __init__(self, path, error):
        super().__init__(f"{path}: {error}")
        self.path = path
        self.error = error


class RenderError(LivemarkError):
    pass
