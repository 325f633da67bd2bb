"""
Numguess CLI - Command-line interface for the game.

Usage:
    numguess serve [--host HOST] [--port PORT]    Run the web app
    numguess play                                 Play a round in the terminal
"""

import argparse
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Numguess - Session-scoped number guessing game",
        prog="numguess",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the web app")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--root-path", default="", help="Prefix the app is mounted under")

    # Play command
    subparsers.add_parser("play", help="Play in the terminal")

    args = parser.parse_args(argv)

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "play":
        cmd_play(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the FastAPI app under uvicorn."""
    import uvicorn
    from .api.app import configure_logging

    configure_logging()
    uvicorn.run(
        "numguess.api.app:app",
        host=args.host,
        port=args.port,
        root_path=args.root_path,
    )


def cmd_play(args, input_fn=input):
    """Guess in the terminal until the player quits."""
    from .engine_core import GuessSession, Outcome, Session, SECRET_MIN, SECRET_MAX
    from .api.pages import message_for

    game = GuessSession(Session())
    game.ensure_initialized()

    print("Number Guessing Game")
    print(f"I'm thinking of a number between {SECRET_MIN} and {SECRET_MAX}. Enter q to quit.")

    while True:
        try:
            raw = input_fn("Your guess: ")
        except EOFError:
            break
        if raw.strip().lower() == "q":
            break

        outcome = game.evaluate(raw.strip())
        print(message_for(outcome))

        if outcome == Outcome.CORRECT:
            print("New round! I picked another number.")

    print("Thanks for playing!")


if __name__ == "__main__":
    main()
