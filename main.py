# main.py
import json
import sys

from flightpath.app.build import build
from flightpath.io.export import write_json


def run(scenario_file: str, out=sys.stdout):
    with open(scenario_file) as fh:
        cfg = json.load(fh)

    app = build(cfg)

    # Export the sampled trajectory (metadata + cached points)
    write_json(app.export(), out)
    return app


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python main.py SCENARIO.json")
    run(sys.argv[1])
