"""Theme, navigation, content and assets for the portfolio page."""
