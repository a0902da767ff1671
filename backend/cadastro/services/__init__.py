"""Services — IO-bound shell around the pure core (persistence)."""
