"""Feature computation over order books, trades, liquidations and market snapshots."""