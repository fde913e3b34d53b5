"""媒体库 API"""
from flask import jsonify, request
from . import media_bp
from .forms import FolderForm, MediaUpdateForm
from blogdesk.exceptions import ValidationError, NotFound
from blogdesk.services.media_service import MediaService
from blogdesk.utils.decorators import api_errors, json_payload
from blogdesk.utils.validators import first_error


def _file_list(files, **extra):
    payload = {'files': files, 'total': len(files), 'success': True}
    payload.update(extra)
    return jsonify(payload)


@media_bp.route('', methods=['GET'])
@api_errors('Failed to fetch files')
def list_files():
    """文件列表：stats=true > search > type > folder > 全部"""
    file_type = request.args.get('type')
    folder = request.args.get('folder')
    search = request.args.get('search')

    if request.args.get('stats') == 'true':
        return jsonify({**MediaService.get_stats(), 'success': True})
    if search:
        return _file_list(MediaService.search(search))
    if file_type and file_type != 'all':
        return _file_list(MediaService.get_by_type(file_type), filter={'type': file_type})
    if folder:
        return _file_list(MediaService.get_by_folder(folder), filter={'folder': folder})
    return _file_list(MediaService.get_all())


@media_bp.route('/upload', methods=['POST'])
@api_errors('Failed to upload file')
def upload_file():
    """multipart 上传：file, altText, caption, tags (逗号分隔), folder"""
    media_file = MediaService.upload(
        request.files.get('file'),
        alt_text=request.form.get('altText'),
        caption=request.form.get('caption'),
        tags=request.form.get('tags'),
        folder=request.form.get('folder'),
    )
    return jsonify({'file': media_file, 'success': True, 'message': 'File uploaded successfully'}), 201


@media_bp.route('/folders', methods=['GET'])
@api_errors('Failed to fetch folders')
def list_folders():
    folders = MediaService.get_all_folders()
    return jsonify({'folders': folders, 'total': len(folders), 'success': True})


@media_bp.route('/folders', methods=['POST'])
@api_errors('Failed to create folder')
def create_folder():
    data = json_payload()
    form = FolderForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    folder = MediaService.create_folder(data['name'], data.get('description'))
    return jsonify({'folder': folder, 'success': True, 'message': 'Folder created successfully'}), 201


@media_bp.route('/folders/<folder_id>', methods=['DELETE'])
@api_errors('Failed to delete folder')
def delete_folder(folder_id):
    moved = MediaService.delete_folder(folder_id)
    return jsonify({'success': True, 'moved': moved, 'message': 'Folder deleted successfully'})


@media_bp.route('/<file_id>', methods=['GET'])
@api_errors('Failed to fetch file')
def get_file(file_id):
    media_file = MediaService.get_by_id(file_id)
    if media_file is None:
        raise NotFound('File not found')
    return jsonify({'file': media_file, 'success': True})


@media_bp.route('/<file_id>', methods=['PUT'])
@api_errors('Failed to update file')
def update_file(file_id):
    data = json_payload()
    form = MediaUpdateForm(data=data)
    if not form.validate():
        raise ValidationError(first_error(form))
    media_file = MediaService.update(file_id, data)
    return jsonify({'file': media_file, 'success': True, 'message': 'File updated successfully'})


@media_bp.route('/<file_id>', methods=['DELETE'])
@api_errors('Failed to delete file')
def delete_file(file_id):
    MediaService.delete(file_id)
    return jsonify({'success': True, 'message': 'File deleted successfully'})
