import logging
import os

import aiohttp
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from wordassist.context_extractor import Position, get_root_selection
from wordassist.datamuse_api import DatamuseApi
from wordassist.lookup_coordinator import (
    NO_ALLITERATIONS_NOTICE,
    NO_WORD_NOTICE,
    LookupCoordinator,
    split_alliterative_selection,
)
from wordassist.result_cache import Category
from wordassist.settings import Settings
from wordassist.text_buffer import TextBuffer
from wordassist.ui import MenuRecorder, NoticeLog, filter_suggestions
from wordassist.wordnet_lexicon import WordNetLexicon

logger = logging.getLogger(__name__)


def _make_client(settings: Settings):
    if settings.lexicon == "wordnet":
        return WordNetLexicon()
    return DatamuseApi()


def create_app(coordinator: LookupCoordinator | None = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    if coordinator is None:
        settings = Settings.load()
        coordinator = LookupCoordinator(_make_client(settings), settings)
    app.config["COORDINATOR"] = coordinator

    def _coordinator() -> LookupCoordinator:
        return app.config["COORDINATOR"]

    def _position(raw, name: str) -> Position:
        if not isinstance(raw, dict):
            raise ValueError(f"'{name}' must be an object with 'line' and 'ch'")
        try:
            return Position(int(raw.get("line", 0)), int(raw.get("ch", 0)))
        except TypeError:
            raise ValueError(f"'{name}' line and ch must be integers") from None

    def _buffer_from(payload: dict) -> TextBuffer:
        text = payload.get("text")
        if not isinstance(text, str):
            raise ValueError("Missing 'text'")
        cursor = _position(payload.get("cursor") or {}, "cursor")
        buf = TextBuffer(text, cursor=cursor)
        sel = payload.get("selection")
        if sel:
            if not isinstance(sel, dict):
                raise ValueError("'selection' must be an object with 'from' and 'to'")
            buf.set_selection(_position(sel.get("from"), "selection.from"),
                              _position(sel.get("to"), "selection.to"))
        return buf

    @app.errorhandler(ValueError)
    def bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(aiohttp.ClientError)
    def upstream_failed(e):
        logger.warning("Lexical service failed: %s", e)
        return jsonify({"error": f"Lexical service error: {e}"}), 502

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return jsonify({"error": str(e)}), 500

    @app.route("/api/context", methods=["POST"])
    def api_context():
        payload = request.get_json(silent=True) or {}
        ctx = get_root_selection(_buffer_from(payload))
        return jsonify(ctx.to_dict())

    @app.route("/api/lookup/<category>", methods=["POST"])
    async def api_lookup(category: str):
        try:
            category = Category(category)
        except ValueError:
            return jsonify({"error": f"Unknown category '{category}'"}), 404
        payload = request.get_json(silent=True) or {}
        buf = _buffer_from(payload)
        ctx = get_root_selection(buf)
        if not ctx.word:
            return jsonify({"context": ctx.to_dict(), "results": [], "notice": NO_WORD_NOTICE})

        coordinator = _coordinator()
        results = await coordinator.processor_for(category)(ctx.word, ctx.sentence)
        menu = MenuRecorder()
        coordinator.create_menu_for_words(menu, results, buf, ctx.start, ctx.end)
        query = payload.get("query")
        return jsonify({
            "context": ctx.to_dict(),
            "results": filter_suggestions(results, query) if query else results,
            "menu": menu.to_list(),
        })

    @app.route("/api/alliterative", methods=["POST"])
    async def api_alliterative():
        payload = request.get_json(silent=True) or {}
        prior_word, root_word = split_alliterative_selection(payload.get("selection") or "")
        if not root_word:
            return jsonify({"results": [], "notice": NO_WORD_NOTICE})
        results = await _coordinator().client.alliterative_synonyms(prior_word, root_word)
        if not results:
            return jsonify({"results": [], "notice": NO_ALLITERATIONS_NOTICE})
        return jsonify({"results": results})

    @app.route("/api/replace", methods=["POST"])
    def api_replace():
        payload = request.get_json(silent=True) or {}
        buf = _buffer_from(payload)
        word = payload.get("word")
        if not isinstance(word, str):
            raise ValueError("Missing 'word'")
        buf.replace_range(word, _position(payload.get("from"), "from"), _position(payload.get("to"), "to"))
        return jsonify({"text": buf.text})

    @app.route("/api/cache/clear", methods=["POST"])
    def api_clear_cache():
        notices = NoticeLog()
        _coordinator().clear_cache(notices)
        return jsonify({"ok": True, "notice": notices.messages[-1]})

    @app.route("/healthz", methods=["GET"])
    def health():
        return jsonify({"ok": True})

    return app


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    port = int(os.environ.get("PORT", 8080))
    create_app().run(host="0.0.0.0", port=port, debug=False)
