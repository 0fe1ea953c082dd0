"""MindSync study companion backend"""
