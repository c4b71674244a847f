import io
from pathlib import Path

import pytest
from werkzeug.datastructures import FileStorage

from utils.data import create_record_stores
from utils.errors import FileTooLargeError, ValidationError
from utils.helpers import check_upload_size, save_upload


CONTACT = {'name': 'A', 'email': 'a@b.com', 'message': 'hi'}
TWO_MB = 2 * 1024 * 1024


def make_upload(content, filename):
    return FileStorage(stream=io.BytesIO(content), filename=filename)


def post_with_file(client, content=None, filename='brief.txt', **fields):
    data = dict(CONTACT)
    data.update(fields)
    if content is not None:
        data['myFile1'] = (io.BytesIO(content), filename)
    return client.post('/contact-with-file', data=data, content_type='multipart/form-data')


def test_attachment_is_stored_under_its_name(app, client):
    response = post_with_file(client, b'project brief', 'brief.txt')

    body = response.get_json()
    assert response.status_code == 200
    assert body['success'] is True
    assert body['message'] == 'I got a file brief.txt'
    assert body['data']['attachment'] == 'brief.txt'
    assert (Path(app.config['UPLOAD_FOLDER']) / 'brief.txt').read_bytes() == b'project brief'
    assert len(client.get('/contact').get_json()) == 1


def test_contact_without_attachment(client):
    response = post_with_file(client)

    body = response.get_json()
    assert response.status_code == 200
    assert body['message'] == 'Contact info saved!'
    assert 'attachment' not in body['data']


def test_attachment_at_the_limit_is_accepted(client):
    response = post_with_file(client, b'x' * TWO_MB, 'exact.bin')
    assert response.status_code == 200


def test_oversized_attachment_rejected_and_nothing_persisted(app, client):
    response = post_with_file(client, b'x' * (TWO_MB + 1), 'huge.bin')

    assert response.status_code == 413
    assert response.get_json()['success'] is False
    assert client.get('/contact').get_json() == []
    assert not (Path(app.config['UPLOAD_FOLDER']) / 'huge.bin').exists()


def test_attachment_requires_contact_fields(client):
    response = post_with_file(client, b'data', 'brief.txt', email='')

    assert response.status_code == 400
    assert response.get_json()['missing'] == ['email']
    assert client.get('/contact').get_json() == []


def test_same_filename_overwrites(app, client):
    post_with_file(client, b'first', 'brief.txt')
    post_with_file(client, b'second', 'brief.txt')

    assert (Path(app.config['UPLOAD_FOLDER']) / 'brief.txt').read_bytes() == b'second'
    assert len(client.get('/contact').get_json()) == 2


def test_relocation_failure_answers_500(client, monkeypatch):
    def fail_save(self, dst, buffer_size=16384):
        raise OSError('read-only file system')

    monkeypatch.setattr(FileStorage, 'save', fail_save)

    response = post_with_file(client, b'data', 'brief.txt')

    assert response.status_code == 500
    assert response.get_json() == {'success': False, 'message': 'File upload failed'}
    assert client.get('/contact').get_json() == []


def test_request_over_content_length_is_413(client):
    response = post_with_file(client, b'x' * (5 * 1024 * 1024), 'enormous.bin')

    assert response.status_code == 413
    assert response.get_json()['success'] is False


def test_attachment_removed_when_contact_cannot_be_saved(app_factory, broken_session):
    app = app_factory(stores=create_record_stores(session=broken_session))

    response = post_with_file(app.test_client(), b'project brief', 'brief.txt')

    assert response.status_code == 500
    uploads = Path(app.config['UPLOAD_FOLDER'])
    assert not uploads.exists() or list(uploads.iterdir()) == []


def test_non_ascii_filenames_keep_their_names(app, client):
    first = post_with_file(client, b'resume', '履歷.pdf')
    second = post_with_file(client, b'report', '報告.pdf')

    assert first.get_json()['message'] == 'I got a file 履歷.pdf'
    assert second.get_json()['data']['attachment'] == '報告.pdf'
    uploads = Path(app.config['UPLOAD_FOLDER'])
    assert (uploads / '履歷.pdf').read_bytes() == b'resume'
    assert (uploads / '報告.pdf').read_bytes() == b'report'


@pytest.mark.parametrize('raw,stored', [
    ('../../etc/passwd', 'passwd'),
    ('C:\\Users\\me\\cv.docx', 'cv.docx'),
    ('  notes.txt ', 'notes.txt'),
])
def test_save_upload_keeps_only_the_last_path_component(app, tmp_path, raw, stored):
    with app.app_context():
        assert save_upload(make_upload(b'data', raw), str(tmp_path / 'up'), TWO_MB) == stored

    assert [p.name for p in (tmp_path / 'up').iterdir()] == [stored]


def test_save_upload_rejects_empty_filename(app, tmp_path):
    with app.app_context():
        with pytest.raises(ValidationError):
            save_upload(make_upload(b'data', '../..'), str(tmp_path / 'up'), TWO_MB)


def test_check_upload_size_rewinds_stream():
    upload = make_upload(b'12345', 'a.txt')

    assert check_upload_size(upload, 10) == 5
    assert upload.stream.read() == b'12345'

    with pytest.raises(FileTooLargeError):
        check_upload_size(upload, 4)
