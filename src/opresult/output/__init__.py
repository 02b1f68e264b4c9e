"""Output layer — rendering envelopes for humans, machines and logs.

Output modules read envelopes; they never mutate them.
"""
