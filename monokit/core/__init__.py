"""Core workspace logic: config reading, discovery, go.work sync, deploy resolution."""
