"""Runtime services shared by the Result core."""
