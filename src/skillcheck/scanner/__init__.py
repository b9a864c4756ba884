"""Rule-based pattern scanner for skill descriptors."""
