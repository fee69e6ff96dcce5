"Tests for the ecstealth package."
