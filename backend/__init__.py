"""HTTP backend for the phonetic spelling checker."""
