"""Infrastructure implementations (MongoDB persistence)."""
