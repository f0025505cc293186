class StreamingXMLError(Exception):
    pass


class SessionStateError(StreamingXMLError, RuntimeError):
    pass


class DataSourceError(StreamingXMLError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass
