"""file-journal - timestamped markdown notes in a year/month tree."""
