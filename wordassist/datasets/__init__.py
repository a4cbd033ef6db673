from .io import load_words, iter_records, write_lines, write_records
from .validator import load_wordlist, validate_wordlist, pretty_summary

__all__ = ["load_words", "iter_records", "write_lines", "write_records",
           "load_wordlist", "validate_wordlist", "pretty_summary"]
