"""
Helpers Module - Request payloads and contact attachment handling
"""

import os
from flask import current_app, request
from werkzeug.security import safe_join
from werkzeug.utils import secure_filename
from .errors import FileTooLargeError, UploadError, ValidationError


def get_upload_size(file):
    """Size in bytes of an uploaded FileStorage, stream left at the start"""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def check_upload_size(file, max_size):
    size = get_upload_size(file)
    if size > max_size:
        raise FileTooLargeError(
            f"File is too large. Maximum size is {max_size // (1024 * 1024)}MB")
    return size


def save_upload(file, upload_folder, max_size):
    """
    Move an uploaded file into the uploads area under its original name

    An existing file with the same name is overwritten.

    Returns:
        str: The stored filename

    Raises:
        FileTooLargeError: file exceeds max_size
        ValidationError: filename is empty or only path separators
        UploadError: file could not be written
    """
    check_upload_size(file, max_size)

    filename = upload_filename(file.filename)
    if not filename:
        raise ValidationError('Invalid filename')

    destination = safe_join(upload_folder, filename)
    if destination is None:
        filename = secure_filename(filename)
        if not filename:
            raise ValidationError('Invalid filename')
        destination = os.path.join(upload_folder, filename)

    try:
        os.makedirs(upload_folder, exist_ok=True)
        file.save(destination)
    except OSError as e:
        current_app.logger.error(f"Error saving upload {filename}: {str(e)}")
        raise UploadError() from e

    current_app.logger.info(f"Stored upload {filename} in {upload_folder}")
    return filename


def upload_filename(raw_name):
    """Last path component of a client filename, Unicode kept; '' if unusable"""
    name = (raw_name or '').replace('\x00', '').replace('\\', '/')
    name = os.path.basename(name).strip()
    if name in ('', '.', '..'):
        return ''
    return name


def discard_upload(upload_folder, filename):
    """Remove a stored attachment whose contact could not be saved"""
    try:
        os.remove(os.path.join(upload_folder, filename))
    except OSError as e:
        current_app.logger.warning(f"Could not remove orphaned upload {filename}: {str(e)}")


def get_request_payload():
    """JSON body, or the form fields of a urlencoded/multipart post"""
    payload = request.get_json(silent=True)
    if payload is None and request.form:
        payload = request.form.to_dict()
    return payload
