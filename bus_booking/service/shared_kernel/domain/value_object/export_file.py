import attrs


@attrs.frozen
class ExportFile:
    filename: str
    content: str
    record_count: int
    media_type: str = 'text/csv'
