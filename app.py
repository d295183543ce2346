from flask import Flask, request, jsonify, session
import logging
import uuid

from wordler import Corpus, GameService, SessionStore, daily_key
from wordler.config import Config
from wordler.errors import ClueError, SessionError, SessionNotFoundError
from wordler import solver


def create_app(config=None, corpus=None):
    """
    Build the Flask app around a game service.

    A broken corpus raises CorpusError here, before any request is served.
    """
    config = config or Config.from_env()
    if corpus is None:
        corpus = Corpus.load_file(config.corpus_file, config.word_length)

    app = Flask(__name__)
    app.secret_key = config.secret_key
    app.config["WORDLER"] = config

    store = SessionStore(config.max_attempts, config.eviction_policy(), config.selection_salt)
    service = GameService(corpus, store)
    app.extensions["wordler"] = service

    def session_id(create=False):
        sid = session.get("sid")
        if sid is None and create:
            sid = session["sid"] = uuid.uuid4().hex
        return sid

    def json_body():
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def selection_key(sid):
        data = json_body()
        key = data.get("key")
        if key is not None:
            return str(key)
        if config.selection == "session":
            return sid
        return daily_key()

    @app.errorhandler(SessionError)
    def session_error(e):
        return jsonify({"error": str(e), "code": e.code}), e.status_code

    @app.errorhandler(ClueError)
    def clue_error(e):
        return jsonify({"error": str(e), "code": e.code}), 400

    @app.route("/corpus", methods=["GET"])
    def corpus_info():
        return jsonify(service.corpus_info())

    @app.route("/start", methods=["POST"])
    def start():
        sid = session_id(create=True)
        return jsonify(service.start_or_resume(sid, selection_key(sid)))

    @app.route("/state", methods=["GET"])
    def state():
        sid = session_id()
        if sid is None:
            raise SessionNotFoundError(sid)
        return jsonify(service.state(sid))

    @app.route("/guess", methods=["POST"])
    def guess():
        sid = session_id()
        if sid is None:
            raise SessionNotFoundError(sid)

        data = json_body()
        guess_word = data.get("guess") or ""
        if not isinstance(guess_word, str):
            return jsonify({"error": "Guess must be a string.", "code": "invalid_guess"}), 400

        return jsonify(service.submit_guess(sid, guess_word))

    @app.route("/reset", methods=["POST"])
    def reset():
        old = session.pop("sid", None)
        if old is not None:
            store.discard(old)
        sid = session_id(create=True)
        app.logger.info("Session %s reset to %s", old, sid)
        return jsonify(service.start_or_resume(sid, selection_key(sid)))

    @app.route("/api/words/<path:pattern>", methods=["GET"])
    def api_words(pattern):
        clue = solver.parse_clues(pattern)
        return jsonify(solver.filter_words(clue, corpus))

    @app.route("/api/most_letters/<int:n>/<letters>", methods=["GET"])
    def api_most_letters(n, letters):
        if not letters.isalpha():
            raise ClueError(f"Invalid letters: {letters}")
        return jsonify(solver.most_letters(corpus, letters, n))

    @app.route("/api/most_common/<int:n>", methods=["GET"])
    def api_most_common(n):
        return jsonify(solver.most_common(corpus, n))

    app.logger.info("Serving %r with %d attempts per game", corpus, config.max_attempts)
    return app


def main():
    config = Config.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(config)
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
