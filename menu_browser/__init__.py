"""Terminal menu browser with an in-memory catalog and composable view filters."""
