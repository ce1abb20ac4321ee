from functools import wraps

import flask
from flask.json import jsonify


def jsonify_response(func):
    @wraps(func)
    def func_wrapper(*args, **kwargs):
        response = func(*args, **kwargs)
        if not response:
            return flask.make_response(), 400
        elif isinstance(response, tuple):
            (data, code) = response
        else:
            data = response
            code = 200

        return flask.make_response(jsonify(data)), code

    return func_wrapper
