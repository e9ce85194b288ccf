"""Components that each read one piece of system information, and keyboard helpers."""