"""Currency conversion policies for Money."""
