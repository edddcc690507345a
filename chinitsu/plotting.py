"""
Plotting utilities for wait-count experiments.

All plots are saved as PNG files (dpi=200) in non-interactive mode.
"""

import os
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np


def ensure_dir(path):
    """Ensure directory exists, create if it doesn't."""
    os.makedirs(path, exist_ok=True)


def save_bar_plot(labels, values, title, outfile, xlabel="Category", ylabel="Value", color=None):
    """
    Save a bar chart.

    Args:
        labels: X-axis labels
        values: Y-axis values
        title: Plot title
        outfile: Output file path
        xlabel: X-axis label
        ylabel: Y-axis label
        color: Bar color (optional)
    """
    plt.figure(figsize=(8, 6))
    bars = plt.bar([str(label) for label in labels], values, color=color, alpha=0.7,
                   edgecolor='black', linewidth=1.5)

    # Add value labels on bars
    for bar in bars:
        height = bar.get_height()
        plt.text(bar.get_x() + bar.get_width()/2., height,
                f'{height:.2f}',
                ha='center', va='bottom', fontsize=10)

    plt.xlabel(xlabel, fontsize=12)
    plt.ylabel(ylabel, fontsize=12)
    plt.title(title, fontsize=14, fontweight='bold')
    plt.grid(True, alpha=0.3, axis='y')
    plt.tight_layout()
    plt.savefig(outfile, dpi=200, bbox_inches='tight')
    plt.close()


def save_wait_histogram(data_dict, title, outfile, xlabel="Number of waits", ylabel="Frequency",
                        density=True, colors=None):
    """
    Save overlaid wait-count histograms, one series per hand size.

    Args:
        data_dict: Dictionary of {label: wait_counts}
        title: Plot title
        outfile: Output file path
        xlabel: X-axis label
        ylabel: Y-axis label
        density: Whether to normalize each series
        colors: Optional list of colors for different series
    """
    plt.figure(figsize=(8, 6))
    if colors is None:
        colors = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728']

    # One bin per wait count 0-9
    bin_edges = np.arange(0, 11) - 0.5
    plotted = 0
    for i, (label, series_data) in enumerate(data_dict.items()):
        series_data = np.asarray(series_data)
        if len(series_data) == 0:
            continue
        plt.hist(series_data, bins=bin_edges, density=density, histtype='step', linewidth=2,
                 label=str(label), color=colors[i % len(colors)])
        plotted += 1

    if plotted == 0:
        print(f"Warning: No valid data for histogram: {title}")
        plt.close()
        return

    plt.xticks(range(0, 10))
    plt.xlabel(xlabel, fontsize=12)
    plt.ylabel(ylabel, fontsize=12)
    plt.title(title, fontsize=14, fontweight='bold')
    plt.grid(True, alpha=0.3, axis='y')
    plt.legend()
    plt.tight_layout()
    plt.savefig(outfile, dpi=200, bbox_inches='tight')
    plt.close()
