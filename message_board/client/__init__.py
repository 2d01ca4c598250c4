"""Client Application - message board front end talking to the gateway over HTTP."""
