import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from panchang.services.ephem import init_paths
from panchang.services.orchestrators.panchang_full import build_report
from panchang.services.validation import parse_inputs


def main() -> None:
    load_dotenv()
    init_paths(os.getenv("SE_EPHE_PATH"))
    try:
        lat, lon, target_date = parse_inputs(float(sys.argv[1]), float(sys.argv[2]), sys.argv[3])
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        sys.exit(2)
    out_path = Path(sys.argv[4])
    report = build_report(target_date, lat, lon)
    out_path.write_text(report.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    print(f"Wrote Panchang for {target_date.isoformat()} → {out_path}")


if __name__ == "__main__":
    if len(sys.argv) < 5:
        print("Usage: python cli.py LAT LON YYYY-MM-DD output.json")
        sys.exit(1)
    main()
