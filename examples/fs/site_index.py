"""Build a title index for a directory of templates.

This script walks a directory, parses the front matter of every file whose
extension maps to a known comment convention, and prints one line per
document with its ``title``.

Flow:
    1. Walk the directory tree
    2. Parse each file with frontmatter_fs.parse_file (convention detected
       from the extension)
    3. Skip files with unknown extensions; report malformed front matter

Requirements:
    pip install frontmatter-sdk

Usage:
    python examples/fs/site_index.py ./site
"""

import sys
from pathlib import Path

import yaml

from frontmatter_core import MalformedFrontMatterError, UnknownConventionError
from frontmatter_fs import parse_file


def main() -> None:
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    for path in sorted(p for p in root.rglob("*") if p.is_file()):
        try:
            meta, body = parse_file(path)
        except UnknownConventionError:
            continue
        except (MalformedFrontMatterError, yaml.YAMLError) as exc:
            print(f"{path.relative_to(root)}: invalid front matter ({exc})", file=sys.stderr)
            continue

        title = meta.get("title", "(untitled)")
        print(f"{path.relative_to(root)}: {title} [{len(body.splitlines())} lines]")


if __name__ == "__main__":
    main()
