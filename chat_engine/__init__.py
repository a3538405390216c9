"""Rule-based chat engine behind the Auralis website assistant."""
