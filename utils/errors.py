"""
Errors Module - Error taxonomy shared by the stores, validation and routes
Every error knows the HTTP status it maps to at the handler boundary.
"""


class PortfolioError(Exception):
    """Base class for errors answered as JSON by the app error handler"""
    status_code = 500
    default_message = 'Server Error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(PortfolioError):
    """Missing required fields or malformed request body"""
    status_code = 400
    default_message = 'Invalid request'

    def __init__(self, message=None, missing_fields=None):
        self.missing_fields = list(missing_fields or [])
        if message is None and self.missing_fields:
            message = f"Missing required fields: {', '.join(self.missing_fields)}"
        super().__init__(message)

    def to_dict(self):
        payload = super().to_dict()
        if self.missing_fields:
            payload['missing'] = self.missing_fields
        return payload


class NotFoundError(PortfolioError):
    status_code = 404
    default_message = 'Record not found'


class StorageError(PortfolioError):
    """Underlying persistence failure"""
    status_code = 500
    default_message = 'Server Error'


class UploadError(PortfolioError):
    """Attachment could not be moved into the uploads area"""
    status_code = 500
    default_message = 'File upload failed'


class FileTooLargeError(UploadError):
    status_code = 413
    default_message = 'File is too large'
