"""HTTP hosting for the FakeQL schema."""
