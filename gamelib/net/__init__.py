"""Network message types."""