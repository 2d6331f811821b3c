"""Player session tracking."""