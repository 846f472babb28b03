import logging
import os
import random
import threading
from typing import Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from config import Settings
from data_access import DataStore
from domain.constants import VALID_MODES, WALLS
from main import GameSession, tick_interval_ms
from players import AutoplayPlayer, HumanPlayer
from services import (
    AuthService,
    LeaderboardService,
    NotFoundError,
    ServiceError,
    SpectatorArena,
)

load_dotenv()


def _bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip() or None
    return None


def _json_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def create_app(
    store: Optional[DataStore] = None,
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
) -> Flask:
    """
    Build the API around an explicitly owned DataStore.

    Everything the routes touch (store, services, running games, the
    spectator arena) hangs off this app instance.
    """
    settings = settings or Settings.from_env()
    store = store or DataStore.create(seed=True)
    if rng is None:
        rng = random.Random(settings.seed) if settings.seed is not None else random.Random()

    app = Flask(__name__)

    # Enable CORS for API routes so the browser client (different origin) can call Flask
    CORS(app, resources={r"/api/*": {"origins": settings.cors_allowed_origins}})

    auth = AuthService(store.users, store.sessions)
    leaderboard = LeaderboardService(store.leaderboard, auth, limit=settings.leaderboard_limit)
    arena = SpectatorArena(store.active_players, rng=rng)
    games: Dict[str, GameSession] = {}
    games_lock = threading.Lock()
    autoplay = AutoplayPlayer()

    app.extensions["data_store"] = store
    app.extensions["spectator_arena"] = arena
    app.extensions["games"] = games

    def get_game(game_id: str) -> GameSession:
        with games_lock:
            session = games.get(game_id)
        if session is None:
            raise NotFoundError(f"Game '{game_id}' not found")
        return session

    def game_payload(session: GameSession) -> dict:
        return {
            "gameId": session.game_id,
            "ticks": session.tick_count,
            "tickIntervalMs": tick_interval_ms(
                session.state, settings.base_tick_ms, settings.speed_boost_multiplier
            ),
            "state": session.state.to_dict(),
        }

    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return jsonify({"error": str(error)}), error.status_code

    @app.errorhandler(ValueError)
    def handle_value_error(error):
        logging.warning(f"Rejected request to {request.path}: {error}")
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code
        logging.error(f"Error handling {request.path}: {error}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    # ---------------------------------------------------------------------
    # Auth
    # ---------------------------------------------------------------------

    @app.route("/api/auth/signup", methods=["POST"])
    def signup():
        body = _json_body()
        user, token = auth.signup(body.get("username"), body.get("email"), body.get("password"))
        return jsonify({"user": user, "token": token}), 201

    @app.route("/api/auth/login", methods=["POST"])
    def login():
        body = _json_body()
        user, token = auth.login(body.get("email"), body.get("password"))
        return jsonify({"user": user, "token": token})

    @app.route("/api/auth/logout", methods=["POST"])
    def logout():
        auth.logout(_bearer_token())
        return jsonify({"ok": True})

    @app.route("/api/auth/me", methods=["GET"])
    def current_user():
        return jsonify({"user": auth.get_current_user(_bearer_token())})

    # ---------------------------------------------------------------------
    # Leaderboard
    # ---------------------------------------------------------------------

    @app.route("/api/leaderboard", methods=["GET"])
    def get_leaderboard():
        """
        Top scores, best first.

        Query parameters:
        - mode: 'walls' or 'passthrough' (optional)
        """
        mode = request.args.get("mode") or None
        return jsonify({"entries": leaderboard.get_top_scores(mode)})

    @app.route("/api/leaderboard", methods=["POST"])
    def submit_score():
        body = _json_body()
        entry = leaderboard.submit_score(_bearer_token(), body.get("score"), body.get("mode"))
        return jsonify({"entry": entry}), 201

    # ---------------------------------------------------------------------
    # Spectator
    # ---------------------------------------------------------------------

    @app.route("/api/spectator/players", methods=["GET"])
    def get_active_players():
        return jsonify({"players": arena.active_players_list()})

    @app.route("/api/spectator/players/<player_id>", methods=["GET"])
    def watch_player(player_id):
        player = arena.watch(player_id)
        if player is None:
            raise NotFoundError(f"Player '{player_id}' not found")
        state = arena.state_for(player_id)
        return jsonify({"player": player, "state": state.to_dict() if state else None})

    @app.route("/api/spectator/players/<player_id>", methods=["DELETE"])
    def remove_active_player(player_id):
        if not arena.remove(player_id):
            raise NotFoundError(f"Player '{player_id}' not found")
        return jsonify({"ok": True})

    @app.route("/api/spectator/tick", methods=["POST"])
    def spectator_tick():
        states = arena.tick()
        return jsonify({
            "tickIntervalMs": settings.spectator_tick_ms,
            "states": {pid: state.to_dict() for pid, state in states.items()},
        })

    # ---------------------------------------------------------------------
    # Single games
    # ---------------------------------------------------------------------

    def register_game(session: GameSession) -> None:
        """Track a new session, evicting finished games first, then the oldest, once at capacity."""
        with games_lock:
            while games and len(games) >= settings.max_games:
                finished = [gid for gid, existing in games.items() if existing.game_over]
                evicted = finished[0] if finished else next(iter(games))
                del games[evicted]
                logging.info(f"Evicted game {evicted} ({len(games)} games tracked)")
            games[session.game_id] = session

    @app.route("/api/games", methods=["POST"])
    def create_game():
        mode = _json_body().get("mode") or WALLS
        if mode not in VALID_MODES:
            raise ValueError(f"Unknown game mode '{mode}'")
        session = GameSession(
            mode=mode,
            player=HumanPlayer(),
            rng=rng,
            base_tick_ms=settings.base_tick_ms,
            speed_multiplier=settings.speed_boost_multiplier,
        )
        register_game(session)
        return jsonify(game_payload(session)), 201

    @app.route("/api/games/<game_id>", methods=["GET"])
    def get_game_state(game_id):
        return jsonify(game_payload(get_game(game_id)))

    @app.route("/api/games/<game_id>", methods=["DELETE"])
    def delete_game(game_id):
        with games_lock:
            session = games.pop(game_id, None)
        if session is None:
            raise NotFoundError(f"Game '{game_id}' not found")
        return jsonify({"ok": True, "summary": session.summary()})

    @app.route("/api/games/<game_id>/history", methods=["GET"])
    def get_game_history(game_id):
        session = get_game(game_id)
        return jsonify({"gameId": session.game_id, "states": session.serialize_history()})

    @app.route("/api/games/<game_id>/advance", methods=["POST"])
    def advance_game(game_id):
        """
        Advance one tick with the session's human player.

        Body (optional):
        - direction: 'up' | 'down' | 'left' | 'right'
        - key: a key name such as 'ArrowUp' or 'w'; unmapped keys are ignored
        The last request is held, like a held key, until a new one arrives.
        """
        session = get_game(game_id)
        body = _json_body()
        direction = body.get("direction")
        key = body.get("key")
        if direction is not None:
            session.player.request(direction)
        elif key is not None:
            session.player.press_key(str(key))
        session.tick()
        return jsonify(game_payload(session))

    @app.route("/api/games/<game_id>/autoplay", methods=["POST"])
    def autoplay_game(game_id):
        session = get_game(game_id)
        session.tick(player=autoplay)
        return jsonify(game_payload(session))

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    store = DataStore.create(seed=True)
    try:
        port = int(os.getenv("PORT", "5000"))
        create_app(store, settings).run(host="0.0.0.0", port=port)
    finally:
        store.close()
