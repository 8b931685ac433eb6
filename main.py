"""
GitHub API helper server
Run the Flask OAuth helper for the GitHub API binding.
Usage:
    python main.py
    python main.py --port 8000
    python main.py --debug
"""

import argparse
import sys
from GitHubApi.Routes.AuthRoute import CreateApp, ListEndpoints

app = CreateApp()

def main():
    """Parse arguments and start the helper server."""
    parser = argparse.ArgumentParser(
        description="GitHub API OAuth helper server",
        epilog="""
            Examples:
            python main.py                    # Start on port 5000
            python main.py --port 8000        # Start on port 8000
            python main.py --host 127.0.0.1   # Start on localhost only
            python main.py --debug            # Start in debug mode
        """
    )
    parser.add_argument(
        '--port',
        type=int,
        default=5000,
        help='Port to run the server on (default: 5000)'
    )
    parser.add_argument(
        '--host',
        default='0.0.0.0',
        help='Host to bind to (default: 0.0.0.0)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Run in debug mode'
    )

    args = parser.parse_args()

    print(f"\n{'='*60}")
    print("GitHub API helper server")
    print(f"{'='*60}")
    print(f"Server starting on http://{args.host}:{args.port}")
    print(f"Debug mode: {args.debug}")
    print(f"\nEndpoints:")
    for methods, path in ListEndpoints(app):
        print(f"  {methods:<5}http://{args.host}:{args.port}{path}")
    print(f"{'='*60}\n")

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=args.debug,
            use_reloader=args.debug
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user")
        sys.exit(0)
    except Exception as e:
        print(f"\nError starting server: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
