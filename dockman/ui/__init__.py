"""HTML element tree and reusable UI components."""