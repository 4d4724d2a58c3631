"""HTTP transport exposing a provider to the configuration host."""
import logging

from flask import Flask, jsonify, request

from .data_source import CONFIGURATION_ERROR
from .diagnostics import Diagnostics
from .errors import ConfigurationError
from .provider import TypeProvider

logger = logging.getLogger(__name__)


def create_app(provider: TypeProvider = None) -> Flask:
    provider = provider or TypeProvider()
    app = Flask(__name__)
    app.config["PROVIDER"] = provider

    @app.route('/api/metadata')
    def metadata():
        return jsonify(provider.metadata()), 200

    @app.route('/api/schema')
    def schema():
        return jsonify(provider.get_schema()), 200

    @app.route('/api/data-sources/<type_name>/read', methods=['POST'])
    def read_data_source(type_name):
        try:
            data_source = provider.data_source(type_name)
        except ConfigurationError as e:
            diagnostics = Diagnostics()
            diagnostics.add_error(CONFIGURATION_ERROR, str(e))
            return jsonify({'state': None, 'diagnostics': diagnostics.to_list()}), 404

        body = request.get_json(silent=True)
        if not isinstance(body, dict) or 'config' not in body:
            diagnostics = Diagnostics()
            diagnostics.add_error(CONFIGURATION_ERROR, "request body must be a JSON object with a 'config' member")
            return jsonify({'state': None, 'diagnostics': diagnostics.to_list()}), 400

        resp = data_source.read(body['config'])
        if resp.diagnostics.has_error():
            logger.warning("read of %s returned %d error diagnostic(s)", type_name, len(resp.diagnostics.errors()))
        return jsonify({'state': resp.state, 'diagnostics': resp.diagnostics.to_list()}), 200

    return app
