from __future__ import annotations

import csv
import json
from pathlib import Path
from datetime import datetime, timezone
from typing import Sequence

from .models import PostRecord


FIELDS = ["created_at", "text", "retweet_count", "favorite_count"]


def export_posts(posts: Sequence[PostRecord], handle: str, out_dir: str = "./data/exports") -> tuple[str, str]:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    outp = Path(out_dir)
    outp.mkdir(parents=True, exist_ok=True)

    json_path = str(outp / f"posts_{handle}_{ts}.json")
    csv_path = str(outp / f"posts_{handle}_{ts}.csv")

    rows = [p.to_dict() for p in posts]
    Path(json_path).write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")

    with open(csv_path, "w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k) for k in FIELDS})

    return json_path, csv_path
