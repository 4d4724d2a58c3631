import os
from typing import Iterable, List


def candidate_names(name: str) -> List[str]:
    candidates = [name, f"{name}.json", f"{name}.schema.json"]
    # try lowercase and underscored
    name_snake = name.replace('-', '_').lower()
    candidates.extend([name_snake, f"{name_snake}.json", f"{name_snake}.schema.json"])
    return candidates


def load_document_text(name: str, search_dirs: Iterable[str] = ()) -> str:
    """Return the raw text of a schema or data document.

    `name` may be a path. Otherwise each directory in `search_dirs` is tried
    with the candidates from `candidate_names` (`movie`, `movie.json`,
    `movie.schema.json`, ...). The text is not parsed here.
    """
    if os.path.isfile(name):
        with open(name, encoding="utf-8") as f:
            return f.read()

    tried = []
    for base_dir in search_dirs:
        for cand in candidate_names(name):
            path = os.path.join(base_dir, cand)
            if path in tried:
                continue
            tried.append(path)
            if os.path.isfile(path):
                with open(path, encoding="utf-8") as f:
                    return f.read()
    raise FileNotFoundError(f"document {name!r} not found (tried {', '.join(tried) or name})")
