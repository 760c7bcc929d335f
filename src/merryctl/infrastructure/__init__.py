"""Infrastructure layer — compose subprocesses, group files, faucet HTTP."""
