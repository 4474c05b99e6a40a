"""Runtime values, bytecode, sources and spans shared across Passerine tools."""