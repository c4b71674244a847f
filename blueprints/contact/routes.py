"""
Contact Routes - Contact submissions
Handles: JSON API, legacy form posts, attachments, listing and deletion
"""

from flask import render_template, redirect, request, jsonify, current_app
from utils.data import get_stores
from utils.errors import NotFoundError, StorageError, ValidationError
from utils.helpers import discard_upload, get_request_payload, save_upload
from utils.validation import validate_contact, FORM_SERVICE_DEFAULT, JSON_SERVICE_DEFAULT
from . import contact_bp


CONTACT_FILTER_FIELDS = ('service', 'email')


@contact_bp.route('/contact', methods=['GET'])
def list_contacts():
    """List contacts, optionally filtered by service or email"""
    filters = {k: v for k, v in request.args.items() if k in CONTACT_FILTER_FIELDS}
    return jsonify(get_stores().contacts.find_all(filters or None))


@contact_bp.route('/contact', methods=['POST'])
def submit_contact():
    """Contact form submission from the front-end (JSON)"""
    contact = validate_contact(get_request_payload(), default_service=JSON_SERVICE_DEFAULT)
    record = get_stores().contacts.insert(contact)
    current_app.logger.info(f"Contact saved from {record['email']}, id: {record['id']}")
    return jsonify({'success': True, 'message': 'Contact info saved!', 'data': record})


@contact_bp.route('/contact-form', methods=['POST'])
def submit_contact_form():
    """Legacy HTML form post - answers with a rendered page or plain text"""
    try:
        contact = validate_contact(request.form, default_service=FORM_SERVICE_DEFAULT)
        record = get_stores().contacts.insert(contact)
    except ValidationError as e:
        current_app.logger.warning(f"Contact form rejected: {e.message}")
        return e.message, 400, {'Content-Type': 'text/plain; charset=utf-8'}
    except StorageError as e:
        return e.message, 500, {'Content-Type': 'text/plain; charset=utf-8'}

    return render_template('contact_success.html', contact=record)


@contact_bp.route('/contact-with-file', methods=['POST'])
def submit_contact_with_file():
    """Contact submission with an optional single attachment"""
    contact = validate_contact(get_request_payload(), default_service=JSON_SERVICE_DEFAULT)

    message = 'Contact info saved!'
    upload = request.files.get(current_app.config['UPLOAD_FIELD'])
    if upload and upload.filename:
        filename = save_upload(upload,
                               current_app.config['UPLOAD_FOLDER'],
                               current_app.config['MAX_UPLOAD_SIZE'])
        contact['attachment'] = filename
        message = f"I got a file {filename}"

    try:
        record = get_stores().contacts.insert(contact)
    except StorageError:
        # No record points at the attachment, so it must not stay behind
        if 'attachment' in contact:
            discard_upload(current_app.config['UPLOAD_FOLDER'], contact['attachment'])
        raise
    return jsonify({'success': True, 'message': message, 'data': record})


@contact_bp.route('/contact/<contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    """Delete one contact; unknown ids answer 404"""
    removed = get_stores().contacts.remove(contact_id)
    if not removed:
        raise NotFoundError(f"Contact {contact_id} not found")
    return jsonify({'success': True})


@contact_bp.route('/contact-success/<contact_id>')
def contact_success(contact_id):
    """Success page for a stored contact"""
    record = get_stores().contacts.find_by_id(contact_id)
    if not record:
        return render_template('404.html'), 404
    return render_template('contact_success.html', contact=record)


@contact_bp.route('/showContact')
def show_contact():
    """Static admin page listing contacts"""
    return redirect(current_app.config['CONTACT_ADMIN_PAGE'])
