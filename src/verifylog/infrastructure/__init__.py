"""Infrastructure: logging facade, mock framework and expression capture."""
