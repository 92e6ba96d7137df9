# The Graph gateway API key
api_key = ""

# chain to tag hooks for, one of: 1, 10, 56, 137, 8453, 42161, 43114, 81457
chain_id = "1"

# seconds to wait for the subgraph, None waits indefinitely
request_timeout = None

# output files for the tags, set csv_output to None to skip the CSV
json_output = "hook_tags.json"
csv_output = "hook_tags.csv"

# optional log file in addition to console output
log_file = None
