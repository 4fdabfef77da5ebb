"""HTML name atoms and character-encoding detection."""