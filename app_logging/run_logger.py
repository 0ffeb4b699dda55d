import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


def utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


@dataclass
class RunLogger:
    """
    Append-only JSONL run logger.

    Each call writes one JSON object per line to log_path, one line per
    engine stage boundary (start, end, error).
    """
    run_id: str
    blueprint_slug: str
    log_path: Path

    def _write(self, payload: dict[str, Any]) -> None:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")

    def _event(self, stage: str, event: str, status: str) -> dict[str, Any]:
        return {
            "ts": utc_iso(),
            "run_id": self.run_id,
            "blueprint_slug": self.blueprint_slug,
            "stage": stage,
            "event": event,
            "status": status,
        }

    def start(self, stage: str, input: Any) -> None:
        self._write({**self._event(stage, "start", "ok"), "input": input})

    def end(self, stage: str, output: Any, metrics: Optional[dict[str, Any]] = None) -> None:
        self._write({
            **self._event(stage, "end", "ok"),
            "output": output,
            "metrics": metrics or {},
        })

    def error(self, stage: str, input: Any, err: Exception) -> None:
        self._write({
            **self._event(stage, "error", "error"),
            "input": input,
            "error": {
                "type": err.__class__.__name__,
                "message": str(err),
            },
        })

    def read_events(self) -> list[dict[str, Any]]:
        if not self.log_path.exists():
            return []
        lines = self.log_path.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]
