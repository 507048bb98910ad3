"""Configuration for the parser, the HTTP app and the scripts."""

# Parser
PARSER_CONFIG = {
    "max_output": 1024,  # output capacity, end sentinel included
    "end_marker": "",    # what the cursor returns once input is exhausted
}

# HTTP app
SERVER_CONFIG = {
    "parse_cache_size": 256,
    "max_source_length": 512,
}

# Logging (applied by entry points only)
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
