from .core import run_case, run_batch, summarize, WORDLE_MAX_TURNS
from .io import build_manifest, format_trail, run_id, write_manifest, write_results

__all__ = ["run_case", "run_batch", "summarize", "WORDLE_MAX_TURNS",
           "build_manifest", "format_trail", "run_id", "write_manifest", "write_results"]
