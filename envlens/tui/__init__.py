"""Terminal browser: session state machine and its Textual front end."""
