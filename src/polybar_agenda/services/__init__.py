"""Calendar loading, occurrence selection and label rendering."""
