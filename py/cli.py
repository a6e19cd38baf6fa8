#!/usr/bin/env python3
"""CLI wrapper for the alternating-path library."""
import sys
import json
import altpaths

COMMANDS = {
    'shortest_alternating_paths': lambda args: altpaths.shortest_alternating_paths(args[0], args[1], args[2]),
    'alternating_paths': lambda args: altpaths.alternating_paths(args[0], args[1], args[2]),
}


def main():
    if len(sys.argv) < 2:
        print(json.dumps({"error": "No command provided"}))
        sys.exit(1)
    cmd = sys.argv[1]
    if cmd not in COMMANDS:
        print(json.dumps({"error": f"Unknown command: {cmd}"}))
        sys.exit(1)
    try:
        args = json.loads(sys.stdin.read())
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON input: {e}"}))
        sys.exit(1)
    if not isinstance(args, list) or len(args) != 3:
        print(json.dumps({"error": f"{cmd} takes a JSON array of 3 arguments"}))
        sys.exit(1)
    try:
        result = COMMANDS[cmd](args)
    except altpaths.InvalidGraphError as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)
    print(json.dumps(result))


if __name__ == "__main__":
    main()
