"""Element types and the point/size value types."""
