"""The aspen command for creating Passerine packages, and its manifest."""