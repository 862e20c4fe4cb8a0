"""Remote-server side of the bridge: facade, session, transport, value types."""
