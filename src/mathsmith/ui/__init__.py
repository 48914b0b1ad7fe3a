"""User-facing front ends for mathsmith."""
