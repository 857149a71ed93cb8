"""REST backend for the trading-card game: accounts, card catalog and decks."""
