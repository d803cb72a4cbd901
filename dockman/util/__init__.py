"""Small general-purpose helpers: hashing, files, serialisation, paths and sanitising."""