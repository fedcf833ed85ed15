"""DevConnector API: developer profiles, accounts and posts over REST/JSON."""
