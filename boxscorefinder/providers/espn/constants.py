"""ESPN provider constants."""

ESPN_API_BASE = "https://site.api.espn.com/apis/site/v2/sports"
ESPN_WEB_BASE = "https://www.espn.com"

# Competitor homeAway values
HOME = "home"
AWAY = "away"
