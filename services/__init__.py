# Pure engines: personality codec, reading insights, tarot deck, client metrics
