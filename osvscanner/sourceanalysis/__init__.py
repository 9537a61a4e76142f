"""Reading of the findings that govulncheck reports in its JSON output."""