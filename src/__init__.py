"""WealthWise advisor source root."""
