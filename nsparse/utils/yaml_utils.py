import json
import yaml
from typing import Dict, List

def dump_json(ns: Dict[str, List[str]], indent: int = 2, sort_keys: bool = True) -> str:
	return json.dumps(ns, indent=indent, sort_keys=sort_keys, ensure_ascii=False)

def dump_yaml(ns: Dict[str, List[str]], sort_keys: bool = True) -> str:
	# block style so each clause sits on its own "- " line
	return yaml.safe_dump(ns, sort_keys=sort_keys, default_flow_style=False, allow_unicode=True).rstrip("\n")

def render(ns: Dict[str, List[str]], fmt: str = "json", indent: int = 2, sort_keys: bool = True) -> str:
	fmt = (fmt or "json").lower()
	if fmt == "json":
		return dump_json(ns, indent=indent, sort_keys=sort_keys)
	if fmt in ("yaml", "yml"):
		return dump_yaml(ns, sort_keys=sort_keys)
	raise ValueError(f"unknown output format: {fmt!r}")

def summarize(ns: Dict[str, List[str]]) -> List[str]:
	"""
	One line per namespace in first-seen order, e.g. "push: 1 clause".
	"""
	lines: List[str] = []
	for name, clauses in ns.items():
		n = len(clauses)
		lines.append(f"{name}: {n} clause{'' if n == 1 else 's'}")
	return lines
