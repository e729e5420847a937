# main.py
import argparse
import json
import sys
from pathlib import Path

from waypick.app.build import Session, build
from waypick.config.models import SessionModel
from waypick.io.recorder import JsonlSink, Recorder
from waypick.io.substrates import FoliumSubstrate


def replay(session: Session, actions: list[dict]) -> None:
    """Drive a session from a list like [{"action": "click_map", "lat": .., "lng": ..}, ...]."""
    for a in actions:
        kind = a.get("action")
        if kind == "click_map":
            session.click_map(float(a["lat"]), float(a["lng"]))
        elif kind == "click_marker":
            session.click_marker(str(a["id"]))
        elif kind == "show_connections":
            session.show_connections()
        elif kind == "clear_selection":
            session.clear_selection()
        elif kind == "clear_all":
            session.clear_all()
        else:
            raise ValueError(f"unknown action {kind!r}")


def run(actions_file: Path, config_file: Path | None, out: Path | None) -> int:
    cfg = SessionModel()
    if config_file is not None:
        cfg = SessionModel.model_validate_json(config_file.read_text())
    if out is not None and cfg.substrate.kind != "folium":
        data = cfg.model_dump()
        data["substrate"] = {"kind": "folium"}
        cfg = SessionModel.model_validate(data)

    session = build(cfg, recorder=Recorder(JsonlSink(sys.stderr)))
    try:
        replay(session, json.loads(actions_file.read_text()))
    finally:
        session.close()

    for line in session.selection_text:
        print(line)
    if session.distance_text:
        print(session.distance_text)

    target = out or (Path(cfg.substrate.output) if getattr(cfg.substrate, "output", None) else None)
    if target is not None and isinstance(session.substrate, FoliumSubstrate):
        session.substrate.save(str(target))
        print(f"map written to {target}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Replay waypoint picks against a routing backend.")
    p.add_argument("actions", type=Path, help="JSON list of user actions")
    p.add_argument("--config", type=Path, default=None, help="session config (JSON)")
    p.add_argument("--out", type=Path, default=None, help="write the final map to this HTML file")
    args = p.parse_args(argv)
    return run(args.actions, args.config, args.out)


if __name__ == "__main__":
    raise SystemExit(main())
