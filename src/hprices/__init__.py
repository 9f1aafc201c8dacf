"""Fetches historical stock prices and merges them into hledger price journals."""

NAME = "hprices"
VERSION = "0.1.0"
