"""Page pieces: titles and links, websocket metrics and the interval job table."""