"""Entity-component storage and systems."""