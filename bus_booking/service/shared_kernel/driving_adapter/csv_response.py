from fastapi import Response

from bus_booking.service.shared_kernel.domain.value_object.export_file import ExportFile


def csv_response(export: ExportFile) -> Response:
    """Download response for an export, named after the export file"""
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={'Content-Disposition': f'attachment; filename="{export.filename}"'},
    )
