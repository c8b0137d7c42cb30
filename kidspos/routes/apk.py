# Overview: APK distribution views; the handheld app polls the /api/apk endpoints.

from flask import jsonify, redirect, render_template, request, send_file, url_for

from ..services import get_services
from ..services.apk_service import APK_MIMETYPE
from ..validation import ConflictError, ValidationError, coerce_int
from .helpers import render_error


def _send_apk(apk_id: int):
    services = get_services()
    apk = services.apks.get_version(apk_id)
    path = services.apks.file_path(apk_id)
    response = send_file(
        path,
        mimetype=APK_MIMETYPE,
        as_attachment=True,
        download_name=apk.file_name,
    )
    response.headers["Content-Description"] = "File Transfer"
    response.headers["Content-Transfer-Encoding"] = "binary"
    return response


def api_latest_version():
    apk = get_services().apks.get_latest()
    if apk is None:
        return jsonify({"error": "No APK versions available"}), 404
    return jsonify(apk.to_dict()), 200


def api_check_update():
    raw = request.args.get("currentVersionCode", "")
    if not raw.strip():
        return jsonify({"error": "currentVersionCode is required"}), 400
    try:
        current = coerce_int(raw, "currentVersionCode")
    except ValidationError:
        return jsonify({"error": "Invalid version code"}), 400

    apk = get_services().apks.check_for_update(current)
    return jsonify({
        "hasUpdate": apk is not None,
        "latestVersion": apk.to_dict() if apk else None,
    }), 200


def api_list_versions():
    versions = get_services().apks.list_versions()
    return jsonify([apk.to_dict() for apk in versions]), 200


def api_download(apk_id: int):
    return _send_apk(apk_id)


def api_download_latest():
    apk = get_services().apks.get_latest()
    if apk is None:
        return jsonify({"error": "No APK versions available"}), 404
    return _send_apk(apk.id)


def api_upload():
    apk = get_services().apks.upload(
        request.files.get("file"),
        request.form.get("version"),
        request.form.get("versionCode"),
        request.form.get("releaseNotes", ""),
    )
    return jsonify(apk.to_dict()), 201


def api_delete_version(apk_id: int):
    get_services().apks.delete(apk_id)
    return jsonify({"message": "APK version deleted successfully"}), 200


def api_deactivate_version(apk_id: int):
    apk = get_services().apks.deactivate(apk_id)
    return jsonify(apk.to_dict()), 200


# --- web ---

def apk_index():
    versions = get_services().apks.list_versions()
    return render_template("apk/index.html", title="APK Versions", versions=versions)


def apk_upload_form():
    return render_template("apk/upload.html", title="Upload APK", form={})


def apk_upload():
    form = {
        "version": request.form.get("version", ""),
        "versionCode": request.form.get("versionCode", ""),
        "releaseNotes": request.form.get("releaseNotes", ""),
    }
    try:
        get_services().apks.upload(
            request.files.get("file"), form["version"], form["versionCode"], form["releaseNotes"]
        )
    except (ValidationError, ConflictError) as exc:
        status = 400 if isinstance(exc, ValidationError) else 409
        return render_template("apk/upload.html", title="Upload APK", form=form, error=str(exc)), status
    return redirect(url_for("web.apk_index"), code=303)


def apk_deactivate(apk_id: int):
    try:
        get_services().apks.deactivate(apk_id)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.apk_index"), code=303)


def apk_delete(apk_id: int):
    try:
        get_services().apks.delete(apk_id)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.apk_index"), code=303)
