"""Film/donghua watch list backed by a spreadsheet or a local JSON store."""
