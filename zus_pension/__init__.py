"""FUS20 state-pension projection engine."""
