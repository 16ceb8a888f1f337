# Application layer: HTTP routers, schemas, copilot client, logging
