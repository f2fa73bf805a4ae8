from flask import request


def get_request_data():
    """Body fields from a JSON payload, or from a form post (multipart uploads)."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
