import argparse
import sys
from pathlib import Path


def _add_repo_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


def _collect_inputs(paths: list[str]) -> list[Path]:
    inputs: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            inputs.extend(sorted(path.glob("*.json")))
        elif path.exists():
            inputs.append(path)
    return inputs


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print ordered frame rectangles of sprite sheet JSON exports."
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="JSON文件或目录（目录下取 *.json）",
    )
    parser.add_argument(
        "--config",
        default="",
        help="可选：运行期配置YAML路径",
    )
    args = parser.parse_args()

    _add_repo_to_path()
    from atlas_frames.config import configure_logging, reload_config
    from atlas_frames.decoder import FrameMapDecoder
    from atlas_frames.interfaces import MalformedDocument

    config = reload_config(args.config or None)
    configure_logging(config)
    decoder = FrameMapDecoder(config)

    inputs = _collect_inputs(args.paths)
    if not inputs:
        print("未找到可处理文件")
        return 1

    failed = 0
    for path in inputs:
        try:
            frame_map = decoder.parse(path.read_bytes())
        except MalformedDocument as exc:
            print(f"{path.name}: ERROR {exc}")
            failed += 1
            continue
        print(f"{path.name}: frames={len(frame_map)}")
        for name, rect in decoder.ordered_frames(frame_map):
            print(f"  {name}: {rect.x} {rect.y} {rect.width} {rect.height}")

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
