"""
Flask helper app for the GitHub API binding

Walks a browser through the OAuth2 web flow and exposes a couple of
passthrough endpoints to check a token against the API.

Endpoints:
    GET /api/login       - Redirect to the GitHub authorize page
    GET /api/callback    - Exchange the returned code for a token
    GET /api/rate-limit  - Rate limit status for a token
    GET /api/repository  - Repository details for ?target=owner/repo
"""

from flask import Flask, request, jsonify, redirect
from flask_cors import CORS

from GitHubApi.Utility.env import load_env_file
from GitHubApi.Utility.auth import get_github_token, get_oauth_credentials
from GitHubApi.Utility.url import split_repo
from GitHubApi.Exception.GitHubError import GitHubError
from GitHubApi.GitHub.GitHubFactory import GitHubFactory
from GitHubApi.Routes.validators import validate_callback_args, parse_scope, extract_token

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional mapping applied to app.config (e.g. a test session
                under "GITHUB_SESSION")
    Returns:
        Flask application instance
"""
def CreateApp(config=None):

    app = Flask(__name__)
    # Load environment variables from .env
    load_env_file()
    if config:
        app.config.update(config)
    # Enable CORS for all routes
    CORS(app)
    RegisterRoutes(app)
    return app


def _GetAuth(app: Flask):
    key, secret, redirect_uri = get_oauth_credentials()
    if not key or not secret or not redirect_uri:
        raise GitHubError("OAuth app is not configured (GITHUB_CLIENT_ID, GITHUB_CLIENT_SECRET, GITHUB_REDIRECT_URI)", 500)
    return GitHubFactory.auth(key, secret, redirect_uri, session=app.config.get("GITHUB_SESSION"))


def _GetFactory(app: Flask):
    token = extract_token(request.headers, request.args) or get_github_token()
    if not token:
        raise GitHubError("No GitHub token given", 401)
    return GitHubFactory(token, session=app.config.get("GITHUB_SESSION"))


def _ErrorResponse(e: GitHubError):
    status = e.status_code or 500
    if status == 401:
        error = "unauthorized"
    elif status == 404:
        error = "not_found"
    else:
        error = "github_error"
    return jsonify({"error": error, "message": e.message}), status

"""List the registered API routes.
    Args:
        app: Flask application instance
    Returns:
        (methods, path) pairs sorted by path, without the static route
"""
def ListEndpoints(app: Flask):
    endpoints = []
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        if rule.endpoint == "static":
            continue
        methods = sorted(rule.methods - {"HEAD", "OPTIONS"})
        endpoints.append((", ".join(methods), rule.rule))
    return endpoints

"""Register all API routes.
    Args:
        app: Flask application instance
"""
def RegisterRoutes(app: Flask) -> None:

    @app.route("/")
    def index():
        return "App is running!"

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "GitHub API helper is running"
        }), 200

    """Redirect to the GitHub authorize page.
        Query args:
            scope: optional, comma or space separated
            state: optional, echoed back to the callback
    """
    @app.route('/api/login', methods=['GET'])
    def Login():
        auth = None
        try:
            auth = _GetAuth(app)
            url = auth.get_login_url(parse_scope(request.args.get("scope")), request.args.get("state"))
            logger.info("Redirecting to GitHub authorize page")
            return redirect(url, code=302)
        except GitHubError as e:
            logger.error(f"OAuth configuration error: {e.message}")
            return _ErrorResponse(e)
        finally:
            if auth:
                auth.close()

    """Exchange the authorization code for an access token.
        Returns:
            JSON with the token mapping returned by GitHub
    """
    @app.route('/api/callback', methods=['GET'])
    def Callback():
        auth = None
        try:
            try:
                code, state = validate_callback_args(request.args)
            except ValueError as e:
                return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

            auth = _GetAuth(app)
            result = auth.get_access(code)
            if "error" in result:
                return jsonify({
                    "error": result.get("error"),
                    "message": result.get("error_description") or "OAuth exchange failed"
                }), 400
            logger.info("OAuth exchange completed")
            return jsonify({"success": True, "state": state, "token": result}), 200

        except GitHubError as e:
            logger.error(f"OAuth error: {e.message}")
            return _ErrorResponse(e)

        except Exception as e:
            logger.exception(f"Error exchanging OAuth code: {str(e)}")
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500
        finally:
            if auth:
                auth.close()

    @app.route('/api/rate-limit', methods=['GET'])
    def RateLimitEndpoint():
        factory = None
        try:
            factory = _GetFactory(app)
            return jsonify(factory.misc().rate_limit().get_rate_limit_status()), 200
        except GitHubError as e:
            logger.error(f"GitHub API error: {e.message}")
            return _ErrorResponse(e)
        except Exception as e:
            logger.exception(f"Error reading rate limit: {str(e)}")
            return jsonify({"error": "internal_error", "message": str(e)}), 500
        finally:
            if factory:
                factory.close()

    """Repository details.
        Query args:
            target: owner/repo, a GitHub URL or an SSH remote
    """
    @app.route('/api/repository', methods=['GET'])
    def RepositoryEndpoint():
        target = request.args.get("target")
        if not target:
            return jsonify({"error": "invalid_parameter", "message": "Query parameter 'target' is required"}), 400
        factory = None
        try:
            owner, repo = split_repo(target)
            factory = _GetFactory(app)
            logger.info(f"Fetching repository: {owner}/{repo}")
            return jsonify(factory.repository().get_repository(owner, repo)), 200
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400
        except GitHubError as e:
            logger.error(f"GitHub API error: {e.message}")
            return _ErrorResponse(e)
        except Exception as e:
            logger.exception(f"Error fetching repository: {str(e)}")
            return jsonify({"error": "internal_error", "message": str(e)}), 500
        finally:
            if factory:
                factory.close()

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or GET /api/login"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
