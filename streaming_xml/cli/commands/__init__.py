"""Click commands for the streaming-xml CLI."""
