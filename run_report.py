#!/usr/bin/env python
"""Measure a scene of shapes and write a JSON report.

Usage:
  python run_report.py --scene configs/demo_scene.yaml --config configs/report_config.yaml

Outputs are written to outputs/<timestamp>/
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime
from pathlib import Path

import yaml

from planekit.builder import build_probes, build_scene
from planekit.report import build_report


def load_yaml(path: str):
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument('--scene', type=str, default='configs/demo_scene.yaml')
    ap.add_argument('--config', type=str, default='configs/report_config.yaml')
    ap.add_argument('--out', type=str, default=None, help='output directory (default: outputs/<timestamp>)')
    args = ap.parse_args()

    root = Path(__file__).resolve().parent
    cfg = load_yaml(str(root / args.config))
    scene = load_yaml(str(root / args.scene))

    out_dir = Path(args.out) if args.out else (root / 'outputs' / datetime.now().strftime('%Y%m%d_%H%M%S'))
    out_dir.mkdir(parents=True, exist_ok=True)

    shapes = build_scene(scene)
    probes = build_probes(scene)
    print(f"[report] Loaded {len(shapes)} shapes, {len(probes)} probes")

    report = build_report(shapes, probes, cfg.get('report', {}))

    with open(out_dir / 'report.json', 'w', encoding='utf-8') as f:
        json.dump(report, f, ensure_ascii=False, indent=2)

    print(f"[report] Output directory: {out_dir}")
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
